from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import EmptyResponseSerializer, ErrorResponseSerializer
from apps.api.utils import empty_response, error_response
from apps.common import get_logger
from apps.common import i18n
from .commands import LoginCommand, RegisterCommand
from .container import build_login_service, build_registration_service
from .serializers import (
    LoginRequestSerializer,
    RegisterRequestSerializer,
    TokenResponseSerializer,
)

logger = get_logger(__name__).bind(component="auth", layer="view")


@extend_schema(tags=["Auth"])
class RegisterView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service = build_registration_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterRequestSerializer,
        responses={
            201: EmptyResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = RegisterRequestSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except DRFValidationError as exc:
            self.log.warning("Registration validation failed", errors=exc.detail)
            return error_response(
                "VALIDATION_ERROR", i18n.INVALID_SIGNUP_FORMAT, exc.detail
            )
        command = RegisterCommand.from_validated(serializer.validated_data)
        self.log.info("Processing registration request", nickname=command.nickname)
        dto, error = self.service.register(command)
        if error:
            code, message, details = error
            self.log.warning("Registration failed", code=code)
            return error_response(code, message, details)
        self.log.info("Registration completed", user_id=dto.id)
        return empty_response(status.HTTP_201_CREATED)


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service = build_login_service()
    log = logger.bind(view="LoginView")

    @extend_schema(
        summary="Login (issue access token)",
        request=LoginRequestSerializer,
        responses={
            200: TokenResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except DRFValidationError as exc:
            self.log.warning("Login validation failed", errors=exc.detail)
            return error_response(
                "VALIDATION_ERROR", i18n.INVALID_LOGIN_FORMAT, exc.detail
            )
        token, error = self.service.login(
            LoginCommand.from_validated(serializer.validated_data)
        )
        if error:
            code, message, details = error
            return error_response(code, message, details)
        return Response(TokenResponseSerializer({"token": token}).data)
