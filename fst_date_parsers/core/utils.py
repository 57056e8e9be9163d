# Copyright (c) 2021, NVIDIA CORPORATION.  All rights reserved.
# Copyright (c) 2024, WENET COMMUNITY.  Xingchen Song (sxc19@tsinghua.org.cn).
# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Shared character sets, graph helpers and configuration loading.
"""

import os
from typing import List

import pynini
import yaml
from importlib_resources import files
from pynini.lib import byte, pynutil, utf8

NEMO_CHAR = utf8.VALID_UTF8_CHAR
NEMO_DIGIT = byte.DIGIT
# Blanks allowed between a quick-offset sign, its amount and its unit
NEMO_BLANK = pynini.union(" ", "\t").optimize()
# Characters that may separate numeric date parts: dd/mm-yyyy, dd.mm, dd<TAB>mm
DATE_SEPARATOR = pynini.union("/", "-", ".", " ", "\t").optimize()

# Marks where the tagged prefix ends and the copied remainder begins.
REST_MARK = "|"
# Cost of every character left unconsumed; keeps the longest prefix cheapest.
REST_CHAR_WEIGHT = 1.0
# Cost step between ordered alternatives; must stay below REST_CHAR_WEIGHT.
PRIORITY_STEP = 0.01

FEATURES_ENV = "FST_DATE_FEATURES"
ALL_FEATURES = ("numeric", "quick", "en", "ru")


def priority_union(*graphs) -> "pynini.Fst":
    """
    Union where earlier graphs win ties.

    Each alternative gets a slightly larger weight than the previous one, so
    when two alternatives consume the same prefix the shortest path picks the
    one listed first. A longer prefix still beats a higher priority.
    """
    return pynini.union(
        *[pynutil.add_weight(graph, index * PRIORITY_STEP) for index, graph in enumerate(graphs)]
    )


def rest_graph() -> "pynini.Fst":
    """Copies whatever follows the recognized prefix, one weight unit per char."""
    return pynini.closure(pynutil.add_weight(NEMO_CHAR, REST_CHAR_WEIGHT))


def lower_preserving_length(text: str) -> str:
    """
    Lowercase ``text`` character by character.

    Characters whose lowercase form has a different length (e.g. "İ") are kept
    as they are, so offsets into the result are offsets into ``text``.
    """
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def matchable_prefix(text: str) -> str:
    """
    The part of ``text`` before the first NUL or lone surrogate.

    No rule can consume either character: NUL is the epsilon label of a byte
    FST and a lone surrogate has no UTF-8 encoding. Matching stops there.
    """
    for index, ch in enumerate(text):
        if ch == "\x00" or "\ud800" <= ch <= "\udfff":
            return text[:index]
    return text


def load_features() -> List[str]:
    """
    Return the enabled feature families.

    The FST_DATE_FEATURES environment variable (comma separated) takes
    precedence over the packaged config/features.yaml.

    Raises:
        ValueError: if an unknown feature is named
    """
    override = os.environ.get(FEATURES_ENV)
    if override is not None:
        features = [item.strip() for item in override.split(",") if item.strip()]
    else:
        config_file = files("fst_date_parsers") / "config" / "features.yaml"
        config = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        features = list(config.get("features", ALL_FEATURES))

    unknown = [feature for feature in features if feature not in ALL_FEATURES]
    if unknown:
        raise ValueError(f"unknown features {unknown}, expected a subset of {list(ALL_FEATURES)}")
    return features
