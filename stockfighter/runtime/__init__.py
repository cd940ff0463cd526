"""Runtime layer: HTTP transport and the endpoint runner."""
