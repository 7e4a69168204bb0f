# users/tests/test_guards.py

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient, APIRequestFactory

from permissions.guards import (
    Allowed,
    GuardState,
    IsPlatformAdmin,
    IsSignedIn,
    Redirect,
    authorize,
    evaluate_gate,
    route_requirement,
)
from users.models import User
from users.services.session import SessionContext


class AuthorizeTests(TestCase):
    """
    Single authorization decision.

    GUARANTEES:
    - No principal -> login
    - Missing role -> seller dashboard
    - Anonymous users denied everywhere
    """

    def setUp(self):
        self.factory = APIRequestFactory()
        self.admin = User.objects.create_user(phone="5550000001", password="1234", role="admin")
        self.seller = User.objects.create_user(phone="5550000002", password="1234")

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _request_for(self, user=None):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_no_principal_redirects_to_login(self):
        self.assertEqual(authorize(None), Redirect("/auth/login"))
        self.assertEqual(authorize(AnonymousUser(), "admin"), Redirect("/auth/login"))

    def test_missing_role_redirects_to_dashboard(self):
        self.assertEqual(authorize(self.seller, "admin"), Redirect("/seller/dashboard"))

    def test_allowed(self):
        self.assertEqual(authorize(self.seller), Allowed())
        self.assertEqual(authorize(self.admin, "admin"), Allowed())

    def test_role_lookup_is_injectable(self):
        decision = authorize(self.seller, "admin", has_role=lambda user, role: True)
        self.assertEqual(decision, Allowed())

    def test_drf_permissions(self):
        self.assertTrue(IsSignedIn().has_permission(self._request_for(self.seller), None))
        self.assertTrue(IsPlatformAdmin().has_permission(self._request_for(self.admin), None))

        permission = IsPlatformAdmin()
        self.assertFalse(permission.has_permission(self._request_for(self.seller), None))
        self.assertEqual(permission.message["redirect"], "/seller/dashboard")

    def test_anonymous_user_denied_everywhere(self):
        request = self._request_for(None)

        self.assertFalse(IsSignedIn().has_permission(request, None))
        self.assertFalse(IsPlatformAdmin().has_permission(request, None))


class RouteGateTests(SimpleTestCase):
    def test_checking_never_redirects(self):
        decision = evaluate_gate(SessionContext(), "admin")

        self.assertEqual(decision.state, GuardState.CHECKING)
        self.assertIsNone(decision.redirect)
        self.assertFalse(decision.renders_content)

    def test_resolved_without_principal(self):
        session = SessionContext()
        session.resolve(None)

        decision = evaluate_gate(session)
        self.assertEqual(decision.state, GuardState.UNAUTHENTICATED)
        self.assertEqual(decision.redirect, "/auth/login")

    def test_role_gate_states(self):
        principal = User(phone="5550000003", role="seller")

        denied = evaluate_gate(SessionContext(principal, loading=False), "admin")
        self.assertEqual(denied.state, GuardState.UNAUTHORIZED)
        self.assertEqual(denied.redirect, "/seller/dashboard")

        allowed = evaluate_gate(
            SessionContext(principal, loading=False),
            "admin",
            has_role=lambda user, role: True,
        )
        self.assertEqual(allowed.state, GuardState.AUTHORIZED)
        self.assertTrue(allowed.renders_content)

    def test_signed_in_gate(self):
        principal = User(phone="5550000003")
        decision = evaluate_gate(SessionContext(principal, loading=False))

        self.assertEqual(decision.state, GuardState.AUTHENTICATED)

    def test_session_listeners(self):
        session = SessionContext()
        seen = []
        unsubscribe = session.subscribe(seen.append)

        session.resolve("someone")
        session.sign_out()
        unsubscribe()
        session.resolve("ignored")

        self.assertEqual(seen, ["someone", None])
        self.assertFalse(session.loading)

    def test_route_requirements(self):
        self.assertEqual(route_requirement("/admin/"), (True, "admin"))
        self.assertEqual(route_requirement("seller/dashboard"), (True, None))
        self.assertEqual(route_requirement("/store/home-goods"), (False, None))
        self.assertEqual(route_requirement("/"), (False, None))


class GateApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def _gate(self, route):
        return self.client.get("/api/auth/gate/", {"route": route})

    def test_anonymous_on_admin_route(self):
        response = self._gate("/admin")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["state"], "unauthenticated")
        self.assertEqual(response.data["redirect"], "/auth/login")

    def test_seller_on_admin_route(self):
        self.client.force_authenticate(User.objects.create_user(phone="5550000004", password="1234"))

        response = self._gate("/admin")

        self.assertEqual(response.data["state"], "unauthorized")
        self.assertEqual(response.data["redirect"], "/seller/dashboard")

    def test_admin_on_admin_route(self):
        self.client.force_authenticate(
            User.objects.create_user(phone="5550000005", password="1234", role="admin")
        )

        response = self._gate("/admin")

        self.assertEqual(response.data["state"], "authorized")
        self.assertIsNone(response.data["redirect"])

    def test_storefront_route_is_public(self):
        response = self._gate("/store/home-goods")

        self.assertFalse(response.data["gated"])
        self.assertEqual(response.data["state"], "authorized")
