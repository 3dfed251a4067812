# syllabus_rag/pipeline/__init__.py
from .engine import TutorAnswer, TutorPipeline

__all__ = ["TutorAnswer", "TutorPipeline"]
