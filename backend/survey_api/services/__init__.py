# Services package init
"""
Survey API Backend: Services Layer
=====================================

What:  Persistence and error translation between routes (HTTP) and the database.
How:   One stateless service per collection; each method receives the
       request's session and performs a single round trip.

Service Inventory:
    - SurveyService:    create / list / get / update surveys
    - ResponseService:  submit / list-by-survey / get survey responses
    - UserService:      lookup, create (hashed), login, provider login
    - FeedbackService:  submit / list feedback
    - validation:       identifier parsing and required-field checks
"""
