# API Route Constants

# Base API
API_BASE = '/api'

# Person routes
PERSON_BASE = f'{API_BASE}/person'
PERSON_GET = PERSON_BASE

# User routes
USER_BASE = f'{API_BASE}/user'
USER_GET = f'{USER_BASE}/{{user_id}}'

# Product routes
PRODUCT_BASE = f'{API_BASE}/product'
PRODUCT_CREATE = PRODUCT_BASE
PRODUCT_GET = f'{PRODUCT_BASE}/{{product_id}}'

# Review routes (nested under product)
PRODUCT_REVIEW_CREATE = f'{PRODUCT_BASE}/{{product_id}}/review'
PRODUCT_REVIEW_LIST = f'{PRODUCT_BASE}/{{product_id}}/review'
