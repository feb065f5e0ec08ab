# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------
"""Command line interface: bulk import and the interactive word tree shell"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from avl_trees.avl_tree_base import AVLTreeBase, LINE_SEP
from avl_trees.base import Promotion
from avl_trees.browser import FileBrowser
from avl_trees.factory import create_avl_tree
from avl_trees.importer import import_file
from avl_trees.tokens import read_token

logger = logging.getLogger(__name__)

EXIT_COMMAND = 7


class WordTreeShell:
    """
    Numbered-command loop operating on a single tree.

    Input and output are injectable so the loop can be driven by scripts
    and tests.
    """

    INSTRUCTIONS = (
        "To insert a value: press 1\n"
        "To locate a value: press 2\n"
        "To delete a value: press 3\n"
        "To view: press 4\n"
        "To view verbosely: press 5\n"
        "To import a *.txt file: press 6\n"
        "To exit: press 7"
    )

    def __init__(
        self,
        tree: AVLTreeBase,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        browser_factory: Callable[..., FileBrowser] = FileBrowser,
    ):
        self.tree = tree
        self.input = input_func
        self.out = out
        self.browser_factory = browser_factory

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _read_command(self) -> int:
        prompt = "Enter a command: "
        while True:
            raw = self.input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                prompt = "That wasn't even an integer. Try again: "

    def _read_word(self, prompt: str) -> str:
        """Read lines until one holds a token; blank lines are skipped."""
        word = read_token(self.input(prompt))
        while word is None:
            word = read_token(self.input(""))
        return word

    def run(self) -> None:
        """Process commands until exit or end of input."""
        self._print(LINE_SEP)
        self._print(self.INSTRUCTIONS)
        self._print(LINE_SEP)
        while True:
            try:
                choice = self._read_command()
                self._print(LINE_SEP)
                if not self.dispatch(choice):
                    break
            except EOFError:
                self._print("Exiting...")
                break
            self._print(LINE_SEP)

    def dispatch(self, choice: int) -> bool:
        """Execute one command. Returns False once the shell should stop."""
        try:
            if choice == 1:
                self.insert()
            elif choice == 2:
                self.search()
            elif choice == 3:
                self.delete()
            elif choice == 4:
                self._print(self.tree.print_structure())
            elif choice == 5:
                self._print(self.tree.print_structure(verbose=True))
            elif choice == 6:
                self.import_file()
            elif choice == EXIT_COMMAND:
                self._print("Exiting...")
                return False
            else:
                self._print("Invalid command!")
                self._print(self.INSTRUCTIONS)
        except (TypeError, ValueError) as exc:
            self._print(f"Invalid word: {exc}")
        return True

    def insert(self) -> None:
        self.tree.insert(self._read_word("Enter a word to insert into the AVL tree: "))

    def search(self) -> None:
        word = self._read_word("Enter a word to search for in the AVL tree: ")
        result = self.tree.search(word)
        if result.found:
            plural = "" if result.count == 1 else "s"
            self._print(f"Found {result.count} instance{plural} of '{word}'")
        else:
            self._print("Word not found.")

    def delete(self) -> None:
        word = self._read_word("Enter a word to delete from the AVL tree: ")
        if self.tree.is_empty():
            self._print(f"Tree is empty. Cannot remove '{word}'.")
        elif not self.tree.delete(word):
            self._print(f"'{word}' not found. Unable to delete.")

    def import_file(self) -> None:
        browser = self.browser_factory(input_func=self.input, out=self.out)
        path = browser.run()
        if path is None:
            return
        try:
            count = import_file(path, self.tree)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Import of %s failed: %s", path, exc)
            self._print("# Could not open file.")
            return
        self._print(f"# Imported {count} words from {path}")


def _set_verbosity(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    for name in list(logging.root.manager.loggerDict):
        if name == "avl_trees" or name.startswith("avl_trees."):
            logging.getLogger(name).setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avl-words",
        description="Count words in a self-balancing AVL tree",
    )
    parser.add_argument("--promotion", choices=[p.value for p in Promotion],
                        default=Promotion.RANDOM.value,
                        help="Which neighbour replaces a removed node with two children")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random promotion policy")
    parser.add_argument("--import", dest="imports", action="append", default=[],
                        metavar="PATH",
                        help="Import all words of a text file (repeatable)")
    parser.add_argument("--view", action="store_true",
                        help="Print the tree after importing")
    parser.add_argument("--verbose", action="store_true",
                        help="Verbose view and debug logging")
    parser.add_argument("--no-interactive", dest="interactive", action="store_false",
                        help="Do not start the interactive shell")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _set_verbosity(args.verbose)

    tree = create_avl_tree(promotion=args.promotion, seed=args.seed)
    try:
        for path in args.imports:
            try:
                count = import_file(path, tree)
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Could not import {path}: {exc}", file=sys.stderr)
                return 1
            print(f"Imported {count} words from {path}")

        if args.view:
            print(tree.print_structure(verbose=args.verbose))

        if args.interactive:
            WordTreeShell(tree).run()
    finally:
        tree.destroy()
    return 0


if __name__ == "__main__":
    sys.exit(main())
