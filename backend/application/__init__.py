"""Application layer: health form boundary and assessment orchestration."""
