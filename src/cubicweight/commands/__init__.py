"""Click plumbing shared by the cubicweight command."""
