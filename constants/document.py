DEFAULT_SOURCE = "Uploaded File"
