"""
Service layer abstraction.

Services encapsulate business logic and receive their collaborators
(such as the session store) explicitly, so API handlers stay thin and
the logic can be exercised without an HTTP stack.
"""
