"""Qt front panel for the stopwatch design."""
