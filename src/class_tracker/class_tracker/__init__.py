"""Class Tracker package.

Feature modules (students, groups, ...) keep the business rules in plain
service/algorithm layers; Flask controllers stay thin on top of them.
"""
