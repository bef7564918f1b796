"""Python task client: HTTP wrapper, session store and task-list state."""
