"""Module entrypoint for ``python -m codehits``.

All argument parsing happens in ``codehits.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
