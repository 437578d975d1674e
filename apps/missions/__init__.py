"""
Missions app - admin-defined tasks with point rewards, the student
submission workflow and the once-per-day completion rule.
"""
