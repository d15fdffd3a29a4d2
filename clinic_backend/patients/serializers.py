from rest_framework import serializers

from clinic_backend.patients.models import Patient


class PatientResourceSerializer(serializers.ModelSerializer):
    """Public projection of a patient.

    Exactly these four fields leave the API; id and medication_list stay
    server-side.
    """

    date_of_birth = serializers.DateField(format='%Y-%m-%d', read_only=True)

    class Meta:
        model = Patient
        fields = [
            'first_name',
            'last_name',
            'date_of_birth',
            'email',
        ]
        read_only_fields = fields


class PatientWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create and partial update.

    Create: first_name and last_name required and non-blank.
    Update (partial=True): any field may be omitted, but a supplied field
    must pass the same checks, so names can never be blanked.
    """

    class Meta:
        model = Patient
        fields = [
            'first_name',
            'last_name',
            'date_of_birth',
            'email',
        ]
        extra_kwargs = {
            'date_of_birth': {'required': False, 'allow_null': True},
            'email': {'required': False, 'allow_null': True, 'allow_blank': True},
        }

    def validate_email(self, value):
        """An empty address means no address."""
        return value or None

    def create(self, validated_data):
        return Patient.objects.create(**validated_data)

    def update(self, instance, validated_data):
        """Merge only the allow-listed fields present in the payload."""
        changed = [name for name in self.Meta.fields if name in validated_data]
        for name in changed:
            setattr(instance, name, validated_data[name])
        if changed:
            instance.save(update_fields=changed + ['updated_at'])
        return instance
