# Routes package init
"""
Survey API Backend: API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - surveys.py:    POST/GET /api/surveys, GET/PUT /api/surveys/{id}
    - responses.py:  POST /api/survey-responses
                     GET  /api/survey-responses/{surveyId}
                     GET  /api/survey-responses/response/{id}
    - users.py:      GET /api/users, POST /api/users[/create|/register|/login]
                     POST /api/providers/login
    - feedback.py:   POST/GET /api/feedback
    - health.py:     GET /health

Design Principle:
    Routes are THIN: pull data out of the request, call one service method,
    wrap the result with the right status code. Every route is public.
"""
