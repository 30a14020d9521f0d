"""
Jotter: plain-text notes backend for a desktop note-taking app.

Each note is a single Markdown file in the user's data directory:
- Create, list, update, delete
- Filenames derived from sanitized ids
- The filesystem is the database
"""

__version__ = "0.1.0"
