from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import EmptyResponseSerializer, ErrorResponseSerializer
from apps.api.utils import empty_response, error_response
from apps.common import get_logger
from apps.common import i18n
from .commands import CartUpsertCommand
from .container import build_cart_service
from .serializers import CartQuantitySerializer, CartResponseSerializer

logger = get_logger(__name__).bind(component="carts", layer="view")


@extend_schema(tags=["Cart"])
class CartListView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartListView")

    @extend_schema(
        summary="List cart",
        description="Cart lines in the order they were added; goods is null when the goods were removed.",
        responses={
            200: CartResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        items = self.service.list_cart(request.user.id)
        return Response(CartResponseSerializer({"cart": items}).data)


@extend_schema(tags=["Cart"])
class CartLineView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartLineView")

    @extend_schema(
        summary="Put goods into cart",
        description="Creates the cart line or overwrites its quantity.",
        request=CartQuantitySerializer,
        responses={
            200: EmptyResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, goods_id):
        serializer = CartQuantitySerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except DRFValidationError as exc:
            self.log.warning(
                "Cart quantity validation failed", goods_id=goods_id, errors=exc.detail
            )
            return error_response("VALIDATION_ERROR", i18n.INVALID_INPUT, exc.detail)
        command = CartUpsertCommand.from_validated(
            request.user.id, goods_id, serializer.validated_data
        )
        _, error = self.service.upsert(command)
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return empty_response()

    @extend_schema(
        summary="Remove goods from cart",
        description="Always succeeds, whether or not the line exists.",
        responses={
            200: EmptyResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, goods_id):
        self.service.remove(request.user.id, goods_id)
        return empty_response()
