"""HTTP endpoint module for termfolio.

Hosts a single shell session behind a small FastAPI app: clients post
key events and read back the rendered transcript.
"""
