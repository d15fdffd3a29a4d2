from django.db import models


class Patient(models.Model):
    """A person receiving care.

    Records are created through the patient API, which also fills
    medication_list once at creation. The API never deletes rows;
    removal is an admin-site operation.
    """

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    date_of_birth = models.DateField(null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    medication_list = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients_patient'
        ordering = ['id']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self) -> str:
        return f"{self.last_name}, {self.first_name} (id={self.pk})"
