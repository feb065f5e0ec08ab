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
"""Minimal interactive file browser for choosing a *.txt file to import"""

import logging
import os
import stat
from typing import Callable, List, Optional, TextIO, Tuple

logger = logging.getLogger(__name__)

TEXT_SUFFIX = ".txt"


def describe_entry(entry: os.DirEntry) -> str:
    """Human readable kind of a directory entry."""
    if entry.is_symlink():
        return "symbolic link"
    if entry.is_dir(follow_symlinks=False):
        return "directory"
    if entry.is_file(follow_symlinks=False):
        return "file"
    try:
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return "unknown file type"
    if stat.S_ISFIFO(mode):
        return "named pipe (FIFO)"
    if stat.S_ISSOCK(mode):
        return "local domain socket"
    if stat.S_ISCHR(mode):
        return "character device"
    if stat.S_ISBLK(mode):
        return "block device"
    return "unknown file type"


def list_directory(path: str = ".") -> List[Tuple[str, str]]:
    """(name, kind) for every entry of `path`, sorted by name."""
    with os.scandir(path) as it:
        entries = [(entry.name, describe_entry(entry)) for entry in it]
    return sorted(entries)


def subdirectories(path: str = ".") -> List[str]:
    """Names of the directories below `path`, with '.' and '..' first."""
    with os.scandir(path) as it:
        names = sorted(entry.name for entry in it if entry.is_dir())
    return [".", ".."] + names


def text_files(path: str = ".") -> List[str]:
    """Names of the regular files in `path` ending in .txt, sorted."""
    with os.scandir(path) as it:
        return sorted(
            entry.name for entry in it
            if entry.is_file() and entry.name.endswith(TEXT_SUFFIX)
        )


class FileBrowser:
    """
    A small ls / cd / select loop. The working directory is tracked in the
    browser itself; the process working directory is never changed.
    """

    INSTRUCTIONS = (
        "# ls: 1\n"
        "# cd: 2\n"
        "# select: 3\n"
        "# exit: 4"
    )

    def __init__(
        self,
        cwd: Optional[str] = None,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self.cwd = os.path.abspath(cwd or os.getcwd())
        self.input = input_func
        self.out = out

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self.input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                prompt = "# That wasn't even an integer. Try again: "

    def _choose(self, prompt: str, low: int, high: int) -> int:
        choice = self._read_int(prompt)
        while choice < low or choice > high:
            self._print(f"# The number must be between {low} and {high}, inclusive.")
            choice = self._read_int("# Try again: ")
        return choice

    def run(self) -> Optional[str]:
        """
        Loop until a file is selected or the user exits.

        Returns:
            Optional[str]: Absolute path of the selected file, or None.
        """
        self._print(self.INSTRUCTIONS)
        while True:
            self._print(f"# PWD: {self.cwd}")
            cmd = self._read_int("# Enter a command: ")
            if cmd == 1:
                self.ls()
            elif cmd == 2:
                self.cd()
            elif cmd == 3:
                selected = self.select()
                if selected is not None:
                    return selected
            elif cmd == 4:
                self._print("# Exiting file browser...")
                return None
            else:
                self._print("# Invalid command!")
                self._print(self.INSTRUCTIONS)

    def ls(self) -> None:
        try:
            entries = list_directory(self.cwd)
        except OSError as exc:
            logger.debug("Listing %s failed: %s", self.cwd, exc)
            self._print("# Couldn't open the directory!")
            return
        if not entries:
            self._print("# No directory entries found.")
        for name, kind in entries:
            self._print(f"# {name} - {kind}")

    def cd(self) -> None:
        try:
            names = subdirectories(self.cwd)
        except OSError:
            self._print("# Couldn't open the directory!")
            return
        for i, name in enumerate(names):
            self._print(f"# {i}: {name}")
        choice = self._choose(
            "# Enter the number of the directory to move to: ", 0, len(names) - 1
        )
        target = os.path.normpath(os.path.join(self.cwd, names[choice]))
        if os.path.isdir(target) and os.access(target, os.R_OK | os.X_OK):
            self.cwd = target
        else:
            self._print("# Unable to change directory.")

    def select(self) -> Optional[str]:
        try:
            names = text_files(self.cwd)
        except OSError:
            self._print("# Couldn't open the current directory!")
            return None
        if not names:
            self._print(f"# No *{TEXT_SUFFIX} files in directory")
            return None
        self._print("# -1: Cancel")
        for i, name in enumerate(names):
            self._print(f"# {i}: {name}")
        choice = self._choose(
            "# Enter the number of the file to import: ", -1, len(names) - 1
        )
        if choice == -1:
            return None
        return os.path.join(self.cwd, names[choice])
