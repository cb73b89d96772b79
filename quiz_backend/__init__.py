"""Trivia quiz service: answer scoring, score history and leaderboards."""
