"""Tool handlers, one coroutine per catalog operation."""
