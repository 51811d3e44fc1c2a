from shared.exceptions import NotFoundError


def get_or_not_found(queryset, pk, label):
    """Fetch ``pk`` from ``queryset`` or raise NotFoundError naming the resource."""
    obj = queryset.filter(pk=pk).first()
    if obj is None:
        raise NotFoundError(f'{label} not found with id of {pk}')
    return obj
