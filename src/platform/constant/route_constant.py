# API Route Constants

# Base API
API_BASE = '/api'

# Seller routes
SELLER_BASE = f'{API_BASE}/sellers'
SELLER_REGISTER = f'{SELLER_BASE}/register'
SELLER_LOGIN = f'{SELLER_BASE}/login'
SELLER_PROFILE = f'{SELLER_BASE}/profile'
SELLER_GET = f'{SELLER_BASE}/{{seller_id:int}}'

# Seller product routes
SELLER_PRODUCTS = f'{SELLER_BASE}/products'
SELLER_PRODUCT_GET = f'{SELLER_PRODUCTS}/{{product_id}}'

# Public routes
PUBLIC_PRODUCTS = f'{API_BASE}/products'
PUBLIC_PRODUCT_GET = f'{PUBLIC_PRODUCTS}/{{product_id}}'
PUBLIC_AESTHETICS = f'{API_BASE}/aesthetics'
PUBLIC_SELLER_GET = f'{SELLER_BASE}/{{seller_id:int}}/public'

# System routes
HEALTH = f'{API_BASE}/health'
METRICS = '/metrics'
