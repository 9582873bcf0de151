from __future__ import annotations

import logging
import os
import shutil
import tempfile
from typing import Any

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from chronos.repSpec import RepSpec

SchemaVersion = 1


class Config(BaseModel):
    """
    Settings for programs built on chronos, kept in a YAML file.

    rep is the storage policy new values should be made with, e.g.
    ScalarValue.fromParts(s, ss, spec=cfg.rep). Field names stay
    lowerCamelCase so they read the same in the file and in code.
    """
    schemaVersion: int = SchemaVersion
    rep: RepSpec = RepSpec()
    logLevel: str = "INFO"
    notes: str | None = None


def configureLogging(cfg: Config) -> None:
    level = logging.getLevelName(cfg.logLevel.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown logLevel {cfg.logLevel!r}")
    logging.basicConfig(level=level)


def _yaml() -> YAML:
    y = YAML(typ="rt")  # round-trip keeps comments and key order
    y.indent(mapping=2, sequence=2, offset=2)
    return y


def _readDoc(path: str) -> CommentedMap:
    with open(path, encoding="utf-8") as f:
        doc = _yaml().load(f)
    return doc if isinstance(doc, CommentedMap) else CommentedMap()


def _merge(doc: CommentedMap, fresh: dict[str, Any]) -> None:
    # Update doc in place from fresh so comments on surviving keys stay put
    for k in [k for k in doc if k not in fresh]:
        del doc[k]
    for k, v in fresh.items():
        if isinstance(v, dict) and isinstance(doc.get(k), CommentedMap):
            _merge(doc[k], v)
        else:
            doc[k] = v


def _writeAtomically(path: str, doc: CommentedMap, makeBackup: bool) -> None:
    fd, tmpPath = tempfile.mkstemp(prefix=".cfg-", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            _yaml().dump(doc, f)
        if makeBackup and os.path.exists(path):
            shutil.copy2(path, path + ".bak")
        os.replace(tmpPath, path)
    finally:
        if os.path.exists(tmpPath):
            os.remove(tmpPath)


def loadConfig(path: str) -> Config:
    """Read and validate the config at path, creating it with defaults if missing.

    The file is written back in its current form after a successful load, so
    keys the model no longer knows are dropped and missing ones filled in.
    """
    if not os.path.exists(path):
        cfg = Config()
        saveConfig(path, cfg, makeBackup=False)
        logging.info("Config: created %s with defaults", path)
        return cfg

    doc = _readDoc(path)
    version = int(doc.get("schemaVersion", SchemaVersion))
    if version > SchemaVersion:
        raise RuntimeError(f"{path}: schema {version} is newer than supported {SchemaVersion}")

    try:
        cfg = Config.model_validate(dict(doc))
    except ValidationError as e:
        raise RuntimeError(f"{path}: config validation failed: {e}") from e

    saveConfig(path, cfg)
    logging.info("Config: loaded %s, rep %d/%d bits", path,
        cfg.rep.wholesBits, cfg.rep.fractionsBits)
    return cfg


def saveConfig(path: str, cfg: Config, makeBackup: bool = True) -> None:
    doc = _readDoc(path) if os.path.exists(path) else CommentedMap()
    _merge(doc, cfg.model_dump())
    _writeAtomically(path, doc, makeBackup)
    logging.debug("Config: saved %s", path)
