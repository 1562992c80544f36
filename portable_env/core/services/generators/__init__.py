"""
Generators — turn profiles into activation scripts, one per dialect.

Pure functions: configuration records in, script text out.  Nothing
here touches the filesystem.
"""
