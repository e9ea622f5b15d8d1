"""Stage-type classification and novelty detection."""
