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
FST text processor base

Provides the finite-state building blocks shared by every grammar rule:
token wrapping, full-match tagging and on-disk caching of compiled taggers.
"""

import os
from typing import Optional

from pynini import Fst, accep, compose, escape, shortestpath
from pynini.lib.pynutil import insert

from .logger import get_logger


class Processor:
    """
    Base class of every FST rule.

    A subclass builds ``self.tagger`` in ``build_tagger``; ``add_tokens`` wraps
    its output as ``<name> { key: "value" ... }`` so several rules can be
    concatenated into one token stream.

    Attributes:
        name (str): token class emitted by this processor
        tagger (Optional[Fst]): compiled tagger
    """

    def __init__(self, name: str) -> None:
        """
        Args:
            name: token class name, also used in log messages
        """
        self.name = name
        self.tagger: Optional[Fst] = None
        self.logger = get_logger(f"{__name__}.{name}")

    def add_tokens(self, tagger: Fst) -> Fst:
        """
        Wrap the tagger output with the token class name.

        Args:
            tagger: fst producing ``key: "value"`` fields

        Returns:
            Fst: fst producing ``<name> { ... } ``
        """
        tagger = insert(f"{self.name} {{ ") + tagger + insert(" } ")
        return tagger.optimize()

    def build_fst(self, prefix: str, cache_dir: Optional[str] = None, overwrite_cache: bool = False) -> None:
        """
        Build the tagger, reading it from / writing it to ``cache_dir`` when given.

        Args:
            prefix: cache file name prefix
            cache_dir: directory for compiled FST files, None disables caching
            overwrite_cache: rebuild even when a cached FST exists
        """
        if cache_dir is None:
            self.logger.info(f"Building FST for {self.name}...")
            self.build_tagger()
            self.tagger = self.tagger.optimize()
            return

        os.makedirs(cache_dir, exist_ok=True)
        tagger_path = os.path.join(cache_dir, f"{prefix}_tagger.fst")

        if os.path.exists(tagger_path) and not overwrite_cache:
            self.logger.info(f"Found cached FST: {tagger_path}")
            self.tagger = Fst.read(tagger_path)
        else:
            self.logger.info(f"Building FST for {self.name}...")
            self.build_tagger()
            self.tagger = self.tagger.optimize()
            self.tagger.write(tagger_path)
            self.logger.info(f"FST written to {tagger_path}")

    def build_tagger(self) -> None:
        """
        Build ``self.tagger``. Subclasses must implement this.

        Raises:
            NotImplementedError: if not overridden
        """
        raise NotImplementedError("subclasses must implement build_tagger")

    def tag(self, text: str) -> Optional[str]:
        """
        Match the whole of ``text`` against the tagger.

        Args:
            text: input text

        Returns:
            Optional[str]: the tagged text, or None when the input is not
            accepted in full
        """
        if self.tagger is None:
            raise ValueError(f"tagger {self.name} is not built, call build_fst first")

        lattice = compose(accep(escape(text)), self.tagger)
        if lattice.num_states() == 0:
            return None

        shortest = shortestpath(lattice, nshortest=1)
        if shortest.num_states() == 0:
            return None

        return shortest.string()
