"""Dream mini house generator: idea -> description, views, sketch, cutting list."""
