# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - Email verification before first sign-in
# - Password sign-in and JWT access tokens

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Resolve the identity behind an access token
- auth.admin.sign_out() - Revoke the refresh tokens of a session
- auth.admin.delete_user() - Delete an account (service role key only)

Every activity table references auth.users(id) through user_id with
ON DELETE CASCADE, so deleting the account removes its rows. Storage objects
are not covered by the cascade and are removed explicitly.
"""
