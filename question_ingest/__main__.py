"""
Module entry point for: python -m question_ingest

Allows running the ingester directly as a module:
    python -m question_ingest ingest <file> [options]
    python -m question_ingest detect <file>
    python -m question_ingest export <file> --format text
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
