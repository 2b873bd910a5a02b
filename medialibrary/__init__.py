"""Media library app: item descriptors and file-type classification."""
