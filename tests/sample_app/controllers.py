"""Controllers the generator tests document."""


class StoreUserRequest:
    def rules(self):
        return {
            "name": ["required", "string"],
            "age": ["integer"],
        }


class ListUsersRequest:
    def rules(self):
        return {
            "page": "integer",
            "status": "in:active,banned",
            "tags": "array",
            "tags.*": "integer",
        }


class UserController:
    def index(self, request: ListUsersRequest):
        """List users.

        Results are paginated.
        """

    def show(self, user_id):
        """Get user

        Returns details.
        """

    def store(self, request: StoreUserRequest):
        """Create a user.

        @deprecated use the bulk import endpoint
        """

    def update(self, user_id, request: "StoreUserRequest"):
        """Update a user."""

    def archive(self, user_id):
        """/** Archive a user."""

    def destroy(self, user_id):
        pass


class AdminController:
    def stats(self):
        """Usage statistics."""


class SearchRequest:
    def __init__(self, data):
        self.data = data

    def rules(self):
        return {"q": "required|string"}


class FailingRequest:
    def rules(self):
        raise LookupError("rules table missing")


class SearchController:
    def search(self, request: SearchRequest):
        """Search everything."""

    def suggest(self, request: FailingRequest):
        """Suggest terms."""
