"""Package entry point for ``python -m transcript_exporter``.

WHY: Users export a transcript JSON file from the terminal with
``python -m transcript_exporter transcript.json --format pdf``.

HOW: Delegates to the CLI's main() function.
"""

if __name__ == "__main__":
    from transcript_exporter.cli import main
    main()
