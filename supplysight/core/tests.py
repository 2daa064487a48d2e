"""
Test suite for Core module
Tests: pagination clamping and domain error rendering
"""
from django.test import SimpleTestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import ValidationError

from supplysight.core.exceptions import (
    InsufficientStock, InvalidInput, NotFound, api_exception_handler
)
from supplysight.core.pagination import clamp_page, paginate


class PaginationTests(SimpleTestCase):
    """Test fixed-size page slicing"""

    def test_default_page_size_is_ten(self):
        page = paginate(range(25))
        self.assertEqual(page['results'], list(range(10)))
        self.assertEqual(page['total_pages'], 3)
        self.assertEqual(page['count'], 25)

    def test_last_partial_page(self):
        page = paginate(range(25), page=3)
        self.assertEqual(page['results'], [20, 21, 22, 23, 24])

    def test_page_is_clamped(self):
        self.assertEqual(paginate(range(25), page=99)['page'], 3)
        self.assertEqual(paginate(range(25), page=0)['page'], 1)
        self.assertEqual(paginate(range(25), page=-4)['page'], 1)
        self.assertEqual(paginate(range(25), page='abc')['page'], 1)
        self.assertEqual(paginate(range(25), page='2')['page'], 2)

    def test_empty_list_has_one_page(self):
        page = paginate([], page=5)
        self.assertEqual(page['page'], 1)
        self.assertEqual(page['total_pages'], 1)
        self.assertEqual(page['results'], [])

    def test_clamp_page(self):
        self.assertEqual(clamp_page(None, 4), 1)
        self.assertEqual(clamp_page(7, 0), 1)

    @override_settings(SUPPLYSIGHT_PAGE_SIZE=4)
    def test_page_size_from_settings(self):
        self.assertEqual(paginate(range(10))['total_pages'], 3)


class ExceptionHandlerTests(SimpleTestCase):
    """Test domain errors become API responses"""

    def test_domain_errors(self):
        cases = [
            (NotFound('Product P-1 not found'), status.HTTP_404_NOT_FOUND, 'not_found'),
            (InsufficientStock(), status.HTTP_409_CONFLICT, 'insufficient_stock'),
            (InvalidInput('Quantity must be greater than zero'), status.HTTP_400_BAD_REQUEST, 'invalid_input'),
        ]
        for exc, expected_status, code in cases:
            response = api_exception_handler(exc, {})
            self.assertEqual(response.status_code, expected_status)
            self.assertEqual(response.data, {'error': exc.message, 'code': code})

    def test_default_messages(self):
        self.assertEqual(InsufficientStock().message, 'Insufficient stock')
        self.assertEqual(NotFound().message, 'Product not found')

    def test_other_errors_use_drf_handler(self):
        response = api_exception_handler(ValidationError({'qty': ['required']}), {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'qty': ['required']})

    def test_unhandled_errors_propagate(self):
        self.assertIsNone(api_exception_handler(RuntimeError('boom'), {}))
