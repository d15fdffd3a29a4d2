import logging

from django.http.request import RawPostDataException
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic_backend.patients.exceptions import MedicationLookupError, MedicationLookupUnavailable
from clinic_backend.patients.models import Patient
from clinic_backend.patients.serializers import PatientResourceSerializer, PatientWriteSerializer
from clinic_backend.patients.services import register_patient

logger = logging.getLogger(__name__)


def _raw_body(request) -> str:
    """Inbound request body as text, read before request.data consumes the stream."""
    try:
        return request.body.decode('utf-8', errors='replace')
    except RawPostDataException:
        # Multipart POST already parsed by middleware (CSRF check). Only the
        # form fields survive; uploaded file parts are not kept.
        return request.POST.urlencode()


class PatientListCreateView(generics.ListCreateAPIView):
    """List patients (paginated) or create a new patient."""

    permission_classes = [IsAuthenticated]
    queryset = Patient.objects.all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientResourceSerializer

    def create(self, request, *args, **kwargs):
        raw_body = _raw_body(request)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            patient = register_patient(serializer, raw_body=raw_body)
        except MedicationLookupError as exc:
            logger.warning('Patient creation aborted: %s', exc.to_dict())
            raise MedicationLookupUnavailable() from exc

        return Response(
            {'data': PatientResourceSerializer(patient).data},
            status=status.HTTP_201_CREATED,
        )


class PatientRetrieveUpdateView(generics.RetrieveUpdateAPIView):
    """Retrieve or partially update a patient. DELETE is not routed (405)."""

    permission_classes = [IsAuthenticated]
    queryset = Patient.objects.all()
    http_method_names = ['get', 'put', 'patch', 'head', 'options']

    def get_serializer_class(self):
        if self.request.method in ['PUT', 'PATCH']:
            return PatientWriteSerializer
        return PatientResourceSerializer

    def retrieve(self, request, *args, **kwargs):
        patient = self.get_object()
        return Response({'data': PatientResourceSerializer(patient).data})

    def update(self, request, *args, **kwargs):
        patient = self.get_object()
        serializer = self.get_serializer(patient, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        patient = serializer.save()
        logger.info('Patient %s updated (fields: %s)', patient.pk, ', '.join(sorted(serializer.validated_data)))

        return Response({'data': PatientResourceSerializer(patient).data})
