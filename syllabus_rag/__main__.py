# syllabus_rag/__main__.py
"""Allow `python -m syllabus_rag`."""

from syllabus_rag.cli.cli import main

if __name__ == "__main__":
    main()
