"""vimcode - open files from an IDE host in a running Vim server."""
