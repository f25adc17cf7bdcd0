"""
Use Cases

Organized by domain folder:
- auth/: Registration, login, profile and password flows
- contact/: Contact form submissions
- roles/: Role administration and seeding
- users/: User administration
- blogs/: Blog publishing and reading
"""
