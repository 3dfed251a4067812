# syllabus_rag/cli/__init__.py
"""Command-line interface (`syllabus-rag`)."""
