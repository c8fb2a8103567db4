"""Dense-adjacency PageRank over small directed graphs."""
