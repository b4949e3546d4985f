from exhibition_api.app.core.security import create_access_token

# Long-lived token for the built-in administrator; lifetime 365 days (seconds)
token = create_access_token({"sub": "admin", "role": "admin"}, expires_delta=365 * 24 * 60 * 60)
print(token)
