#!/usr/bin/env python3
"""Check for banned Python constructions in shquote source.

Banned constructions:

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          shquote is the quoting authority  shquote.core.unquote
    from shlex import     and must not defer to stdlib      shquote.core.quote
    import pipes          removed from stdlib, same reason  shquote.core.quote
"""

import ast
import os
import sys

BANNED_MODULES = {
    "shlex": "use shquote.core.unquote / shquote.core.quote",
    "pipes": "use shquote.core.quote",
}


def find_python_files(directory):
    """Find all .py files recursively."""
    result = []
    for root, _dirs, files in os.walk(directory):
        for f in files:
            if f.endswith(".py"):
                result.append(os.path.join(root, f))
    result.sort()
    return result


def check_source(source, filename="<string>"):
    """Return (lineno, description) for each banned import in source."""
    tree = ast.parse(source, filename)
    errors = []

    for node in ast.walk(tree):
        lineno = getattr(node, "lineno", 0)

        # import shlex
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name in BANNED_MODULES:
                    hint = BANNED_MODULES[alias.name]
                    errors.append((lineno, f"import {alias.name}: banned, {hint}"))

        # from shlex import ...
        if isinstance(node, ast.ImportFrom):
            if node.module in BANNED_MODULES:
                hint = BANNED_MODULES[node.module]
                errors.append(
                    (lineno, f"from {node.module} import: banned, {hint}")
                )

    return errors


def check_file(filepath):
    with open(filepath) as f:
        return check_source(f.read(), filepath)


def check_tree(directory):
    """Return (filepath, lineno, description) for every banned import under directory.

    Raises SyntaxError if a file cannot be parsed.
    """
    found = []
    for filepath in find_python_files(directory):
        found.extend((filepath, lineno, desc) for lineno, desc in check_file(filepath))
    return sorted(found)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    directories = args or ["src"]

    found = []
    for directory in directories:
        if not os.path.isdir(directory):
            print(f"Directory not found: {directory}")
            return 1
        try:
            found.extend(check_tree(directory))
        except SyntaxError as e:
            print(f"Syntax error: {e}")
            return 1

    for filepath, lineno, description in found:
        print(f"{filepath}:{lineno}: {description}")
    if found:
        print(f"{len(found)} banned import(s)")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
