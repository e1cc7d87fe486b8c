"""HR Check-in package.

Feature modules (attendance, lateness, payroll) hold the pure domain logic;
a thin Flask controller layer and a dependency container wire them together.
"""
