from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import yaml

from .errors import SourceFormatError
from .fqdn import fqdn_from_record, normalize_line

logger = logging.getLogger(__name__)


def load_keywords(path: str | Path) -> list[str]:
    """
    Load the keyword list: plain text (one per line), YAML or JSON list.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    text = p.read_text(encoding="utf-8")
    suffix = p.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(text) or []
    elif suffix == ".json":
        data = json.loads(text)
    else:
        data = [line for line in text.splitlines() if not line.lstrip().startswith("#")]
    if not isinstance(data, list):
        raise SourceFormatError(f"{path}: keyword file must hold a list of keywords")

    keywords: list[str] = []
    for item in data:
        if not isinstance(item, (str, int)):
            raise SourceFormatError(f"{path}: unexpected keyword entry {item!r}")
        kw = normalize_line(str(item))
        if kw:
            keywords.append(kw)
    logger.debug("Loaded %d keywords from %s", len(keywords), p)
    return keywords


def read_fqdns(path: str | Path, skip_header: bool = True) -> Iterator[str]:
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            if skip_header and line_num == 1:
                logger.debug("Skipping header line: %r", line.rstrip("\r\n"))
                continue
            fqdn = fqdn_from_record(line)
            if not fqdn:
                continue
            yield fqdn
