"""Race tracker service: runners, races and logged race results."""
