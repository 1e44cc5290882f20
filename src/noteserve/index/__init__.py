"""Search index, summary artifact storage and indexing pipeline."""
