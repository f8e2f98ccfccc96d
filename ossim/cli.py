"""Command line front end: interactive directory sessions and CPU scheduling."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from ossim.directories import DirectoryError, SingleLevelDirectory, TwoLevelDirectory
from ossim.scheduling import Process, fcfs, format_schedule, priority_schedule, sjf

_SINGLE_MENU = "\n1. insert a file\n2. delete a file \n3. list\n4. exit\n(enter your choice) "
_TWO_LEVEL_MENU = (
    "\n1.create new directory  2. insert file   3. delete file    4.display   5.exit\n"
)
_ALGORITHMS = {"fcfs": fcfs, "sjf": sjf, "priority": priority_schedule}


class _EndOfInput(Exception):
    pass


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> str:
    print(prompt, end="")
    try:
        return next(tokens)
    except StopIteration:
        raise _EndOfInput from None


def _single_session(tokens: Iterator[str]) -> None:
    directory = SingleLevelDirectory()
    while True:
        choice = _ask(_SINGLE_MENU, tokens)
        if choice == "1":
            try:
                directory.add(_ask("\nenter the name of file ", tokens))
            except DirectoryError as error:
                print(f"\n {error}")
        elif choice == "2":
            try:
                directory.delete(_ask("\nenter the name of file ", tokens))
                print("\n file deleted ")
            except DirectoryError:
                print("\n file not found")
        elif choice == "3":
            if not len(directory):
                print("\n file is empty")
            for name in directory.files():
                print(name)
        elif choice == "4":
            return


def _two_level_session(tokens: Iterator[str]) -> None:
    tree = TwoLevelDirectory()
    while True:
        choice = _ask(_TWO_LEVEL_MENU, tokens)
        if choice == "1":
            try:
                tree.create_directory(_ask("\nenter the name of directory ", tokens))
            except DirectoryError as error:
                print(f"\n{error}")
        elif choice == "2":
            directory = _ask("\nenter name of directory", tokens)
            if directory not in {name for name, _ in tree.listing()}:
                print("\nnot found")
                continue
            try:
                tree.add_file(directory, _ask("\nenter name of file", tokens))
                print("\ncreated")
            except DirectoryError as error:
                print(f"\n{error}")
        elif choice == "3":
            directory = _ask("\nenter name of directory", tokens)
            if directory not in {name for name, _ in tree.listing()}:
                print("\n not found")
                continue
            try:
                tree.delete_file(directory, _ask("\nenter name of file", tokens))
                print("\nfile deleted")
            except DirectoryError:
                print("\n not found")
        elif choice == "4":
            listing = tree.listing()
            if not listing:
                print("\n empty directory ")
                continue
            print("\ndirectories     files")
            for name, files in listing:
                print(f"{name}      " + "".join(f"{file}      " for file in files))
        elif choice == "5":
            return


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ossim", description="Operating system algorithm simulations."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("single", help="interactive single-level directory")
    commands.add_parser("two-level", help="interactive two-level directory")
    schedule = commands.add_parser("schedule", help="schedule processes on one CPU")
    schedule.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    schedule.add_argument("bursts", type=int, nargs="+", help="burst time of each process")
    schedule.add_argument(
        "--priorities", type=int, nargs="+", help="priority of each process"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "schedule":
        priorities = args.priorities or [0] * len(args.bursts)
        if len(priorities) != len(args.bursts):
            parser.error("give one priority for each burst time")
        try:
            processes = [
                Process(pid, burst, priority)
                for pid, (burst, priority) in enumerate(
                    zip(args.bursts, priorities), start=1
                )
            ]
        except ValueError as error:
            parser.error(str(error))
        print(format_schedule(_ALGORITHMS[args.algorithm](processes)))
        return 0

    session = _single_session if args.command == "single" else _two_level_session
    try:
        session(_tokens(sys.stdin))
    except _EndOfInput:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())