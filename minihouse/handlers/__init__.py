"""Entry points for hosted deployments."""
