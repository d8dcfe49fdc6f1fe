"""Click plumbing shared by the convert-temp entry point."""
