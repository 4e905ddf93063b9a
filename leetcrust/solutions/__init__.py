"""Worked solutions to algorithmic problems, grouped by topic."""