"""Domain layer: problem entities, status catalog and protocols (ports)."""
