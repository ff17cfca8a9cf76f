# Supabase tables: food_photos, reviews
# Storage bucket: food-photos (public)
# This file documents the expected database schema
# Actual operations are handled via OwnedCollection in service.py

"""
Expected Supabase table structure:

food_photos:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null) - renamable display name
- url: text (not null) - public URL of the object at {user_id}/{timestamp_ms}_{file name}
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- created_at: timestamp (default: now())

reviews:
- id: uuid (primary key)
- food_id: uuid (foreign key to food_photos.id, not null)
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- content: text (not null)
- rating: smallint (nullable, 1-5)
- created_at: timestamp (default: now())

Reviews are deleted before their photo; the service does not rely on a
cascade from food_photos.

Row level security (recommended; the service also filters by user_id):
- policy "owner" on food_photos / reviews for all using (auth.uid() = user_id)
"""
