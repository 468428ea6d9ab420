"""Print the OpenAPI schema of the mock API as JSON."""

import json

from stripe_mock.main import app

if __name__ == "__main__":
    print(json.dumps(app.openapi()))
