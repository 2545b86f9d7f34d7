"""Host inspection: OS family, Linux distribution, and process execution."""
