"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from prices.domain.errors import DomainError, ErrorCode
from prices.handlers.serializers import (
    BasePriceSerializer,
    CostSerializer,
    HolidaySerializer,
    PriceQuerySerializer,
    PriceUpdateSerializer,
)
from prices.services import PricingService
from prices.stores.django_store import DjangoHolidayStore, DjangoPriceStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.UNKNOWN_BASE_PRICE: status.HTTP_404_NOT_FOUND,
}


def get_pricing_service() -> PricingService:
    return PricingService(DjangoPriceStore(), DjangoHolidayStore())


def error_response(error: DomainError) -> Response:
    http_status = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    logger.info("Rejected request: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=http_status,
    )


class PriceView(APIView):
    """Handler for GET and PUT /prices"""

    def get(self, request: Request) -> Response:
        query = PriceQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        try:
            quote = get_pricing_service().quote(
                category=params["type"],
                age=params.get("age"),
                date=params.get("date"),
            )
        except DomainError as error:
            return error_response(error)
        return Response(CostSerializer({"cost": quote.cost}).data)

    def put(self, request: Request) -> Response:
        query = PriceUpdateSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        try:
            get_pricing_service().update_base_price(params["type"], params["cost"])
        except DomainError as error:
            return error_response(error)
        return Response({})


class BasePriceListView(APIView):
    """Handler for GET /prices/base"""

    def get(self, request: Request) -> Response:
        base_prices = get_pricing_service().list_base_prices()
        return Response(BasePriceSerializer(base_prices, many=True).data)


class HolidayListView(APIView):
    """Handler for GET /holidays"""

    def get(self, request: Request) -> Response:
        holidays = get_pricing_service().list_holidays()
        return Response(HolidaySerializer(holidays, many=True).data)
