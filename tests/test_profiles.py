import unittest

from botocore.exceptions import NoRegionError, ProfileNotFound

from bucket_replicator.errors import ClientInitError
from bucket_replicator.profiles import (
    DEFAULT_PROFILE,
    DEFAULT_REGION,
    ConnectionProfile,
    create_client,
)


class FakeSession:
    def __init__(self, credentials=object(), client_error=None):
        self.credentials = credentials
        self.client_error = client_error
        self.init_kwargs = None
        self.client_calls = []

    def __call__(self, **kwargs):
        self.init_kwargs = kwargs
        return self

    def get_credentials(self):
        return self.credentials

    def client(self, service_name):
        self.client_calls.append(service_name)
        if self.client_error:
            raise self.client_error
        return "s3-client"


class CreateClientTests(unittest.TestCase):
    def test_defaults_to_fixed_profile_and_region(self):
        session = FakeSession()

        client = create_client(session_factory=session)

        self.assertEqual("s3-client", client)
        self.assertEqual(
            {"profile_name": DEFAULT_PROFILE, "region_name": DEFAULT_REGION},
            session.init_kwargs,
        )
        self.assertEqual("default", DEFAULT_PROFILE)
        self.assertEqual("us-east-1", DEFAULT_REGION)
        self.assertEqual(["s3"], session.client_calls)

    def test_forwards_custom_profile(self):
        session = FakeSession()

        create_client(ConnectionProfile(name="ops", region="eu-west-1"), session_factory=session)

        self.assertEqual({"profile_name": "ops", "region_name": "eu-west-1"}, session.init_kwargs)

    def test_missing_credentials_raise(self):
        session = FakeSession(credentials=None)

        with self.assertRaises(ClientInitError):
            create_client(session_factory=session)
        self.assertEqual([], session.client_calls)

    def test_unknown_profile_raises(self):
        def factory(**kwargs):
            raise ProfileNotFound(profile=kwargs["profile_name"])

        with self.assertRaises(ClientInitError) as ctx:
            create_client(session_factory=factory)
        self.assertIsInstance(ctx.exception.__cause__, ProfileNotFound)

    def test_client_construction_error_raises(self):
        session = FakeSession(client_error=NoRegionError())

        with self.assertRaises(ClientInitError):
            create_client(session_factory=session)


if __name__ == "__main__":
    unittest.main()
