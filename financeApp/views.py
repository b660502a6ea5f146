# views.py
import logging
from decimal import Decimal

from django.db.models import Sum
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Expense, RevenueRecord, EXPENSE_CATEGORIES
from .serializers import ExpenseSerializer, RevenueRecordSerializer

logger = logging.getLogger(__name__)


def _total(queryset, field):
    return queryset.aggregate(total=Sum(field))['total'] or Decimal('0')


def _season_start(today):
    return today.replace(month=1, day=1)


# -------------------- Expenses --------------------

@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_expense(request):
    """Record a farm expense"""
    serializer = ExpenseSerializer(data=request.data, context={'request': request})

    if serializer.is_valid():
        expense = serializer.save(user=request.user)
        logger.info("Expense %s recorded by user %s", expense.id, request.user.id)
        return Response(
            {
                'message': 'Expense recorded successfully',
                'data': ExpenseSerializer(expense).data
            },
            status=status.HTTP_201_CREATED
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_expenses(request):
    expenses = Expense.objects.filter(user=request.user).select_related('crop')

    category = request.GET.get('category')
    if category:
        expenses = expenses.filter(category=category)

    expenses = expenses.order_by('-expense_date', '-created_at')
    serializer = ExpenseSerializer(expenses, many=True)

    return Response(
        {
            'message': 'Expenses retrieved successfully',
            'count': expenses.count(),
            'total': _total(expenses, 'amount'),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_expense(request, expense_id):
    expense = get_object_or_404(Expense, id=expense_id)

    if expense.user != request.user:
        return Response(
            {'error': 'You do not have permission to update this expense'},
            status=status.HTTP_403_FORBIDDEN
        )

    partial = request.method == 'PATCH'
    serializer = ExpenseSerializer(expense, data=request.data, partial=partial, context={'request': request})

    if serializer.is_valid():
        updated_expense = serializer.save()
        return Response(
            {
                'message': 'Expense updated successfully',
                'data': ExpenseSerializer(updated_expense).data
            },
            status=status.HTTP_200_OK
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_expense(request, expense_id):
    expense = get_object_or_404(Expense, id=expense_id)

    if expense.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this expense'},
            status=status.HTTP_403_FORBIDDEN
        )

    expense_data = ExpenseSerializer(expense).data
    expense.delete()

    return Response(
        {
            'message': 'Expense deleted successfully',
            'data': expense_data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_expense_categories(request):
    return Response(
        {
            'message': 'Expense categories retrieved successfully',
            'data': EXPENSE_CATEGORIES
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_expense_summary(request):
    """Total spend and per-category totals, optionally bounded by ?start= and ?end="""
    expenses = Expense.objects.filter(user=request.user)

    bounds = {}
    for param in ('start', 'end'):
        raw = request.GET.get(param)
        if not raw:
            continue
        try:
            parsed = parse_date(raw)
        except ValueError:
            parsed = None
        if parsed is None:
            return Response(
                {'error': f'Invalid {param} date. Use YYYY-MM-DD'},
                status=status.HTTP_400_BAD_REQUEST
            )
        bounds[param] = parsed

    if 'start' in bounds:
        expenses = expenses.filter(expense_date__gte=bounds['start'])
    if 'end' in bounds:
        expenses = expenses.filter(expense_date__lte=bounds['end'])

    by_category = {
        row['category']: row['total']
        for row in expenses.values('category').annotate(total=Sum('amount')).order_by('category')
    }

    return Response(
        {
            'message': 'Expense summary retrieved successfully',
            'data': {
                'total': _total(expenses, 'amount'),
                'count': expenses.count(),
                'by_category': by_category,
                'start': bounds.get('start'),
                'end': bounds.get('end'),
            }
        },
        status=status.HTTP_200_OK
    )


# -------------------- Revenue --------------------

@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_revenue(request):
    """Record a sale; the total is always quantity x price"""
    serializer = RevenueRecordSerializer(data=request.data, context={'request': request})

    if serializer.is_valid():
        record = serializer.save(user=request.user)
        logger.info("Revenue record %s created by user %s", record.id, request.user.id)
        return Response(
            {
                'message': 'Revenue recorded successfully',
                'data': RevenueRecordSerializer(record).data
            },
            status=status.HTTP_201_CREATED
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_revenue(request):
    records = RevenueRecord.objects.filter(user=request.user).select_related('crop')
    serializer = RevenueRecordSerializer(records, many=True)

    return Response(
        {
            'message': 'Revenue records retrieved successfully',
            'count': records.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_revenue(request, revenue_id):
    record = get_object_or_404(RevenueRecord, id=revenue_id)

    if record.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this revenue record'},
            status=status.HTTP_403_FORBIDDEN
        )

    record_data = RevenueRecordSerializer(record).data
    record.delete()

    return Response(
        {
            'message': 'Revenue record deleted successfully',
            'data': record_data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_revenue_summary(request):
    records = RevenueRecord.objects.filter(user=request.user)
    today = timezone.localdate()
    season_start = _season_start(today)

    return Response(
        {
            'message': 'Revenue summary retrieved successfully',
            'data': {
                'season_start': season_start,
                'season_total': _total(records.filter(sale_date__gte=season_start), 'total_amount'),
                'all_time_total': _total(records, 'total_amount'),
                'count': records.count(),
            }
        },
        status=status.HTTP_200_OK
    )
