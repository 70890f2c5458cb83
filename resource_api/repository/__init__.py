"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Every helper runs exactly one statement and returns an ExecResult.
"""
