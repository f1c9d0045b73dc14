"""Hash Box desktop client: multi-digest file hashing and checksum-file verification."""
