"""Services Layer: orchestration of core rules over a repository."""
