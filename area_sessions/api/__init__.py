"""HTTP API for the area session store."""
