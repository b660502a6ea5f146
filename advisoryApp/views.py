# views.py
import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, parser_classes
from rest_framework.parsers import JSONParser, MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .ai_client import AdvisoryClient, AdvisoryRateLimited, AdvisoryServiceError
from .models import ExpertQuery, PestReport
from .serializers import (
    ExpertQuerySerializer,
    SubmitQuerySerializer,
    ExpertAnswerSerializer,
    PestReportSerializer,
    PestStatusSerializer,
    PestIdentifySerializer,
)

logger = logging.getLogger(__name__)

MANUAL_REVIEW_MESSAGE = 'Question submitted successfully. Due to high demand, it will be reviewed manually.'


# -------------------- Expert queries --------------------

@api_view(['POST'])
@permission_classes([IsAuthenticated])
def submit_query(request):
    """Save a question for the experts, optionally asking the AI advisor for an immediate answer"""
    serializer = SubmitQuerySerializer(data=request.data)

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    auto_answer = serializer.validated_data.get('auto_answer', False)
    query = serializer.save(user=request.user)
    logger.info("Expert query %s submitted by user %s", query.id, request.user.id)

    message = 'Question submitted successfully'
    ai_response = None

    if auto_answer and settings.OPENAI_API_KEY:
        try:
            ai_response = AdvisoryClient().answer_question(query.question, query.category)
        except AdvisoryRateLimited:
            message = MANUAL_REVIEW_MESSAGE
        except AdvisoryServiceError as exc:
            logger.error("AI answer for query %s failed: %s", query.id, exc)
        else:
            query.expert_response = ai_response
            query.status = 'answered'
            query.answered_at = timezone.now()
            query.save(update_fields=['expert_response', 'status', 'answered_at'])
            message = 'Question answered by AI advisor'
    elif auto_answer:
        logger.info("Auto answer requested but OPENAI_API_KEY is not configured")

    return Response(
        {
            'message': message,
            'data': ExpertQuerySerializer(query).data,
            'aiResponse': ai_response
        },
        status=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_queries(request):
    queries = ExpertQuery.objects.filter(user=request.user).select_related('answered_by').order_by('-created_at')

    query_status = request.GET.get('status')
    if query_status:
        queries = queries.filter(status=query_status)

    serializer = ExpertQuerySerializer(queries, many=True)
    return Response(
        {
            'message': 'Queries retrieved successfully',
            'count': queries.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_query_by_id(request, query_id):
    query = get_object_or_404(ExpertQuery, id=query_id)

    if query.user != request.user and not request.user.is_expert:
        return Response(
            {'error': 'You do not have permission to view this query'},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response(
        {
            'message': 'Query retrieved successfully',
            'data': ExpertQuerySerializer(query).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['POST', 'PATCH'])
@permission_classes([IsAuthenticated])
def answer_query(request, query_id):
    """Experts and admins answer a farmer's question"""
    if not request.user.is_expert:
        return Response(
            {'error': 'Only experts can answer queries'},
            status=status.HTTP_403_FORBIDDEN
        )

    query = get_object_or_404(ExpertQuery, id=query_id)
    serializer = ExpertAnswerSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    query.expert_response = serializer.validated_data['expert_response']
    query.status = 'answered'
    query.answered_by = request.user
    query.answered_at = timezone.now()
    query.save(update_fields=['expert_response', 'status', 'answered_by', 'answered_at'])
    logger.info("Expert query %s answered by %s", query.id, request.user.id)

    return Response(
        {
            'message': 'Query answered successfully',
            'data': ExpertQuerySerializer(query).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_pending_queries(request):
    if not request.user.is_expert:
        return Response(
            {'error': 'Only experts can view the pending queue'},
            status=status.HTTP_403_FORBIDDEN
        )

    queries = ExpertQuery.objects.filter(status='pending').order_by('created_at')

    category = request.GET.get('category')
    if category:
        queries = queries.filter(category=category)

    serializer = ExpertQuerySerializer(queries, many=True)
    return Response(
        {
            'message': 'Pending queries retrieved successfully',
            'count': queries.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_query(request, query_id):
    query = get_object_or_404(ExpertQuery, id=query_id)

    if query.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this query'},
            status=status.HTTP_403_FORBIDDEN
        )

    query_data = ExpertQuerySerializer(query).data
    query.delete()

    return Response(
        {
            'message': 'Query deleted successfully',
            'data': query_data
        },
        status=status.HTTP_200_OK
    )


# -------------------- Pest reports --------------------

def _normalized_severity(analysis):
    severity = str(analysis.get('severity') or 'medium').lower()
    if severity not in dict(PestReport.SEVERITY_CHOICES):
        return 'medium'
    return severity


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([JSONParser, MultiPartParser, FormParser])
def identify_pest(request):
    """Identify a pest or disease from a crop photo and file a report"""
    serializer = PestIdentifySerializer(data=request.data, context={'request': request})

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    if not settings.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not configured")
        return Response(
            {'error': 'OpenAI API key not configured'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    data_url, image_file = serializer.image_payload()
    description = serializer.validated_data.get('description', '')

    try:
        analysis = AdvisoryClient().identify_pest(data_url, description)
    except AdvisoryServiceError as exc:
        return Response(
            {'error': f'Failed to get AI analysis: {exc}'},
            status=status.HTTP_502_BAD_GATEWAY
        )

    report = PestReport(
        user=request.user,
        crop=serializer.validated_data.get('crop_id'),
        user_description=description,
        ai_identification=analysis,
        severity=_normalized_severity(analysis),
        status='reported',
    )
    report.image.save(image_file.name, image_file, save=False)
    report.image_url = report.image.url
    report.save()
    logger.info("Pest report %s filed by user %s", report.id, request.user.id)

    return Response(
        {
            'message': 'Pest report created successfully',
            'pestReport': PestReportSerializer(report).data,
            'aiAnalysis': analysis
        },
        status=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_reports(request):
    reports = PestReport.objects.filter(user=request.user).select_related('crop').order_by('-created_at')
    serializer = PestReportSerializer(reports, many=True)

    return Response(
        {
            'message': 'Pest reports retrieved successfully',
            'count': reports.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_report_by_id(request, report_id):
    report = get_object_or_404(PestReport, id=report_id)

    if report.user != request.user and not request.user.is_expert:
        return Response(
            {'error': 'You do not have permission to view this report'},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response(
        {
            'message': 'Pest report retrieved successfully',
            'data': PestReportSerializer(report).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_report_status(request, report_id):
    report = get_object_or_404(PestReport, id=report_id)

    if report.user != request.user and not request.user.is_expert:
        return Response(
            {'error': 'You do not have permission to update this report'},
            status=status.HTTP_403_FORBIDDEN
        )

    serializer = PestStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid status',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    report.status = serializer.validated_data['status']
    report.save(update_fields=['status', 'updated_at'])

    return Response(
        {
            'message': 'Pest report status updated successfully',
            'data': PestReportSerializer(report).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_report(request, report_id):
    report = get_object_or_404(PestReport, id=report_id)

    if report.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this report'},
            status=status.HTTP_403_FORBIDDEN
        )

    report_data = PestReportSerializer(report).data
    if report.image:
        report.image.delete(save=False)
    report.delete()

    return Response(
        {
            'message': 'Pest report deleted successfully',
            'data': report_data
        },
        status=status.HTTP_200_OK
    )
