"""Rendering of crawl results: Emacs Lisp constants, JSON, kind report."""

from __future__ import annotations

import json
import sys
from typing import Dict, Iterable, List, Mapping, Optional, TextIO

from .classifier import SymbolSets
from .config import NAMESPACES, Namespace
from .kinds import SymbolBucket

FEATURE_NAME = "swift-mode-standard-types"

_HEADER = f""";;; {FEATURE_NAME}.el --- Major-mode for Apple's Swift programming language, Standard Types. -*- lexical-binding: t -*-

;; Copyright (C) 2018-2020 taku0

;; Authors: taku0 (http://github.com/taku0)
;;
;; Version: 8.0.2
;; Package-Requires: ((emacs "24.4") (seq "2.3"))
;; Keywords: languages swift

;; This file is not part of GNU Emacs.

;; This program is free software: you can redistribute it and/or modify
;; it under the terms of the GNU General Public License as published by
;; the Free Software Foundation, either version 3 of the License, or
;; (at your option) any later version.

;; This program is distributed in the hope that it will be useful,
;; but WITHOUT ANY WARRANTY; without even the implied warranty of
;; MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
;; GNU General Public License for more details.

;; You should have received a copy of the GNU General Public License
;; along with this program.  If not, see <http://www.gnu.org/licenses/>.

;;; Commentary:

;; Types and members of the standard library and Foundation framework.

;;; Code:
"""

_FOOTER = f"""
(provide '{FEATURE_NAME})

;;; {FEATURE_NAME}.el ends here
"""

# Constant-name suffix and docstring noun for each bucket.
_BUCKET_LABELS: Dict[SymbolBucket, tuple] = {
    SymbolBucket.TYPES: ("types", "types"),
    SymbolBucket.ENUM_CASES: ("enum-cases", "enum cases"),
    SymbolBucket.METHODS: ("methods", "methods"),
    SymbolBucket.PROPERTIES: ("properties", "properties"),
    SymbolBucket.FUNCTIONS: ("functions", "functions"),
    SymbolBucket.CONSTANTS: ("constants", "constants"),
}


def _format_defconst(
    const_prefix: str, doc_prefix: str, bucket: SymbolBucket, names: Iterable[str]
) -> List[str]:
    suffix, noun = _BUCKET_LABELS[bucket]
    quoted = "\n    ".join(f'"{name}"' for name in sorted(names))
    return [
        "",
        f"(defconst swift-mode:{const_prefix}-{suffix}",
        f"  '({quoted})",
        f'  "{doc_prefix} {noun}.")',
    ]


def format_elisp(
    symbols: Mapping[str, SymbolSets],
    namespaces: Optional[Iterable[Namespace]] = None,
) -> str:
    """Render *symbols* as the ``swift-mode-standard-types.el`` file.

    Namespaces without a known :class:`Namespace` entry are left out.
    """
    if namespaces is None:
        namespaces = NAMESPACES
    by_prefix = {ns.prefix: ns for ns in namespaces}
    lines = [_HEADER]

    for prefix in sorted(symbols):
        namespace = by_prefix.get(prefix)
        if namespace is None:
            continue
        symbol_sets = symbols[prefix]
        for bucket in SymbolBucket:
            lines.extend(
                _format_defconst(
                    namespace.const_prefix,
                    namespace.doc_prefix,
                    bucket,
                    symbol_sets.bucket(bucket),
                )
            )

    lines.append(_FOOTER)
    return "\n".join(lines)


def format_json(symbols: Mapping[str, SymbolSets]) -> str:
    payload = {prefix: symbols[prefix].to_dict() for prefix in sorted(symbols)}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def report_seen_kinds(seen_kinds: Iterable[str], stream: Optional[TextIO] = None) -> None:
    """Write every observed kind tag, sorted, to *stream* (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write("\n")
    out.write("kinds:\n")
    for kind in sorted(seen_kinds):
        out.write(f"{kind}\n")
