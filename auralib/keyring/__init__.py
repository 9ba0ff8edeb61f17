"""Credentials, password strength, password-protected stores, keyrings and their dialog logic."""