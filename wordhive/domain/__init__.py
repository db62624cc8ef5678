"""Domain layer (pure puzzle logic).

- Keep puzzle generation, word finding, scoring and validation here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no file reads.
- Deterministic functions only (the RNG and word data are passed in as arguments).
"""
