"""Loading, merging and decoding of config documents."""
