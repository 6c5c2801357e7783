from procapi import Router
from procapi.sdk.validator import array, number, object_, string, void

user = object_({"id": string().uuid(), "name": string(), "age": number().optional()})

users_router = (
    Router()
    .query(
        "list",
        input=void(),
        output=array(user),
        meta={"path": "/users", "method": "GET", "tags": ["users"]},
    )
    .query(
        "read",
        input=object_({"id": string().uuid()}),
        output=user,
        meta={"path": "/users/{id}", "method": "GET", "tags": ["users"]},
    )
    .mutation(
        "create",
        input=object_({"name": string(), "age": number().optional()}),
        output=user,
        meta={"path": "/users", "method": "POST", "tags": ["users"], "protect": True},
    )
)

app_router = Router().merge("users.", users_router).subscription("onUserCreated", output=user)

broken_router = Router().query(
    "search",
    input=object_({"limit": number()}),
    output=array(user),
    meta={"path": "/search", "method": "GET"},
)

not_a_router = "nothing to see here"
