"""syxcodec command line interface."""
