"""Support adventure: a branching-narrative game about cloud support tickets."""
