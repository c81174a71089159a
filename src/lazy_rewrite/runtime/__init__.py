"""Runtime services shared by the rewrite components."""
