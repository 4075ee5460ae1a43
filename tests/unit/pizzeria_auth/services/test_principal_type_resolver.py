"""Unit tests for PrincipalTypeResolver."""

import pytest

from pizzeria_auth.services import PrincipalType, PrincipalTypeResolver


class TestPrincipalTypeResolver:
    def setup_method(self):
        self.resolver = PrincipalTypeResolver("work.com")

    def test_customer_domain(self):
        assert self.resolver.resolve("jane@gmail.com") is PrincipalType.CUSTOMER

    def test_company_domain_is_worker(self):
        assert self.resolver.resolve("sam@work.com") is PrincipalType.WORKER

    @pytest.mark.parametrize(
        "identifier",
        ["sam@WORK.COM", "sam@Work.com", "SAM@work.COM"],
    )
    def test_domain_comparison_ignores_case(self, identifier):
        assert self.resolver.resolve(identifier) is PrincipalType.WORKER

    def test_configured_domain_case_is_ignored(self):
        resolver = PrincipalTypeResolver("Work.COM")

        assert resolver.resolve("sam@work.com") is PrincipalType.WORKER
        assert resolver.company_domain == "work.com"

    @pytest.mark.parametrize(
        "identifier",
        [
            None,
            "",
            " ",
            "not-an-email",
            "work.com",
            "sam.work.com",
            "sam(at)work.com",
            "jane\uff20gmail.com",
            "\u00fcber",
        ],
    )
    def test_missing_or_malformed_is_unknown(self, identifier):
        assert self.resolver.resolve(identifier) is PrincipalType.UNKNOWN

    def test_subdomain_is_not_the_company(self):
        assert self.resolver.resolve("sam@mail.work.com") is PrincipalType.CUSTOMER

    def test_domain_is_taken_after_first_at(self):
        """a@b@work.com has domain b@work.com, which is not the company."""
        assert self.resolver.resolve("a@b@work.com") is PrincipalType.CUSTOMER

    def test_type_serializes_by_name(self):
        assert PrincipalType.CUSTOMER.value == "CUSTOMER"
        assert PrincipalType.WORKER.value == "WORKER"
