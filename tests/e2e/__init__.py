"""
Browser test package for MyRent.

These tests drive a real browser through Selenium and demonstrate:
- Page Object Model (POM) pattern
- Waiting on AJAX-populated dropdowns before reading or selecting
- One browser per test thread
- User flow testing (login, cascading search filters)
"""
