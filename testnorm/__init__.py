"""testnorm: keep test names in line with the -test suffix convention."""
