"""Package entry point for ``python -m bionic_reader``.

WHY: Users run the converter as ``python -m bionic_reader notes.txt`` or
pipe text through it. Python's ``-m`` flag looks for ``__main__.py``
inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from bionic_reader.cli import main

if __name__ == "__main__":
    main()
