from fastapi import APIRouter

from eventhub.api.routes import health, auth, users, events, tickets

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])  # GET /, GET /health
api_router.include_router(auth.router, tags=["auth"])  # POST /register, /login, /logout, GET /profile
api_router.include_router(users.router, tags=["users"])  # GET /users
api_router.include_router(events.router, tags=["events"])  # POST /createEvent, GET /events, GET /event/{id}[...]
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])  # POST /, GET /, GET /user/{id}, DELETE /{id}
