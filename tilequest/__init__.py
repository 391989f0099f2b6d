"""Player progression and encounter tile mechanics for a tile-based RPG."""
