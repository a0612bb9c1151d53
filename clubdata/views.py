from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from clubdata.config import ClubDataConfig
from clubdata.record import get_clubdata


class ClubDataView(APIView):
    '''
    Read-only access to the club data record, values HTML-escaped. ?field=<name> narrows the response down to a single
    stored field.
    '''
    permission_classes = [AllowAny]
    renderer_classes = [JSONRenderer]
    http_method_names = ['get', 'head', 'options']

    def get(self, request, *args, **kwargs):
        field = request.query_params.get('field', '')
        data = get_clubdata(ClubDataConfig.from_settings(), field)

        if field and isinstance(data, str):
            return Response({'field': field, 'value': data})

        return Response(data)
