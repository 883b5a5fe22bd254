from resume_analyzer.api import analysis_routes

__all__ = [
    "analysis_routes",
]
