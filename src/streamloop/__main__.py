"""CLI entry point: `streamloop 'List<String>:x' 'int@count'` or `python -m streamloop ...`."""

import logging
import sys
from typing import List, Optional, Tuple


def parse_variable_spec(spec: str) -> Tuple[str, List[str], List[str]]:
    """``TYPE[:best,...][@other,...]`` -> (type text, best candidates, other candidates)"""
    rest, _, other = spec.partition("@")
    type_text, _, best = rest.partition(":")
    return type_text.strip(), _split_names(best), _split_names(other)


def _split_names(names: str) -> List[str]:
    return [n.strip() for n in names.split(",") if n.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .naming import NamingSession
    from .shared.scope import ScopeManager, ScopeKind, BindingType
    from .shared.errors import StreamLoopError

    parser = argparse.ArgumentParser(
        prog="streamloop",
        description="Name the locals of a stream-to-loop rewrite and print their declarations.",
    )
    parser.add_argument("variables", nargs="+", metavar="VAR",
                        help="TYPE[:best,...][@other,...], one per generated local, in planner order")
    parser.add_argument("--reserved", action="append", default=[], metavar="NAME",
                        help="A name already taken in the surrounding code (repeat per name)")
    parser.add_argument("--verbose", action="store_true", help="Log naming decisions")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    scopes = ScopeManager()
    method = scopes.enter_scope(ScopeKind.METHOD)
    for name in args.reserved:
        scopes.define(name, BindingType.LOCAL)

    session = NamingSession(enclosing=method)
    try:
        for spec in args.variables:
            type_text, best, other = parse_variable_spec(spec)
            variable = session.new_variable(type_text)
            for name in best:
                variable.add_best_name_candidate(name)
            for name in other:
                variable.add_other_name_candidate(name)
    except StreamLoopError as e:
        session.discard()
        sys.stderr.write(f"streamloop: error: {e}\n")
        return 1

    session.register_all()
    for variable in session.variables:
        print(variable.declaration)
    return 0


if __name__ == "__main__":
    sys.exit(main())
