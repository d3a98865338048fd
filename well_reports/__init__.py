"""Oil-well operational reporting service."""
