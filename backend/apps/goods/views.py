from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import EmptyResponseSerializer, ErrorResponseSerializer
from apps.api.utils import empty_response
from apps.common import get_logger
from .container import build_goods_service
from .serializers import GoodsDetailResponseSerializer, GoodsListResponseSerializer

logger = get_logger(__name__).bind(component="goods", layer="view")


@extend_schema(tags=["Goods"])
class GoodsListView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_goods_service()
    log = logger.bind(view="GoodsListView")

    @extend_schema(
        operation_id="goods_list",
        summary="List goods",
        description="Newest goods first.",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Only return goods of this category",
                required=False,
                type=str,
            )
        ],
        responses={
            200: GoodsListResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        category = request.query_params.get("category") or None
        self.log.debug("Handling goods list request", category=category)
        goods = self.service.list_goods(category)
        return Response(GoodsListResponseSerializer({"goods": goods}).data)


@extend_schema(tags=["Goods"])
class GoodsDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_goods_service()
    log = logger.bind(view="GoodsDetailView")

    @extend_schema(
        operation_id="goods_retrieve",
        summary="Get goods",
        responses={
            200: GoodsDetailResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: EmptyResponseSerializer,
        },
    )
    def get(self, request, goods_id):
        dto = self.service.get_goods(goods_id)
        if dto is None:
            return empty_response(status.HTTP_404_NOT_FOUND)
        return Response(GoodsDetailResponseSerializer({"goods": dto}).data)
