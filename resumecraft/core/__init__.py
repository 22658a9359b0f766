"""
Core import pipeline modules for ResumeCraft.

Submodules:
- importer: Import orchestration and draft-to-record conversion
- merge: Collection merge and de-duplication
"""
