import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("titulo", models.CharField(blank=True, max_length=255)),
                ("descricao_evento", models.TextField(blank=True)),
                ("local", models.CharField(blank=True, max_length=255)),
                ("endereco_completo", models.CharField(blank=True, max_length=500)),
                (
                    "tipo_local",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("praca", "Praca"),
                            ("parque", "Parque"),
                            ("rua", "Rua"),
                            ("ginasio", "Ginasio"),
                            ("centro_cultural", "Centro Cultural"),
                            ("outro", "Outro"),
                        ],
                        max_length=32,
                    ),
                ),
                ("datas", models.JSONField(blank=True, default=list)),
                ("primeira_data", models.DateField(blank=True, editable=False, null=True)),
                ("ultima_data", models.DateField(blank=True, editable=False, null=True)),
                ("hora_inicio", models.TimeField(blank=True, null=True)),
                ("hora_fim", models.TimeField(blank=True, null=True)),
                ("estimativa_publico", models.PositiveIntegerField(blank=True, null=True)),
                ("promotor_nome", models.CharField(blank=True, max_length=255)),
                ("promotor_cpf", models.CharField(blank=True, max_length=32)),
                ("promotor_telefone", models.CharField(blank=True, max_length=32)),
                ("promotor_email", models.EmailField(blank=True, max_length=254)),
                ("musica", models.BooleanField(default=False)),
                ("modalidade_musica", models.JSONField(blank=True, default=list)),
                ("fins_lucrativos", models.BooleanField(default=False)),
                ("ingressos", models.BooleanField(default=False)),
                ("fechamento_rua", models.BooleanField(default=False)),
                ("autorizacao_sonora", models.BooleanField(default=False)),
                ("instagram_url", models.URLField(blank=True, max_length=500)),
                ("link_oficial", models.URLField(blank=True, max_length=500)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                        ],
                        default="draft",
                        max_length=16,
                    ),
                ),
                ("banner_url", models.URLField(blank=True, max_length=500, null=True)),
                ("foto1_url", models.URLField(blank=True, max_length=500, null=True)),
                ("foto2_url", models.URLField(blank=True, max_length=500, null=True)),
                ("foto3_url", models.URLField(blank=True, max_length=500, null=True)),
                ("requerimento_autorizacao_url", models.URLField(blank=True, max_length=500, null=True)),
                ("projeto_evento_url", models.URLField(blank=True, max_length=500, null=True)),
                ("planta_local_url", models.URLField(blank=True, max_length=500, null=True)),
                ("avcb_bombeiros_url", models.URLField(blank=True, max_length=500, null=True)),
                ("apolice_seguro_url", models.URLField(blank=True, max_length=500, null=True)),
                ("plano_seguranca_url", models.URLField(blank=True, max_length=500, null=True)),
                ("alvara_funcionamento_url", models.URLField(blank=True, max_length=500, null=True)),
                ("autorizacao_sonora_doc_url", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="eventos",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "eventos",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="eventos_created_idx"),
                    models.Index(fields=["status", "-created_at"], name="eventos_status_idx"),
                    models.Index(fields=["user", "-created_at"], name="eventos_owner_idx"),
                    models.Index(fields=["status", "primeira_data"], name="eventos_upcoming_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ScheduleEntry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("data", models.DateField()),
                ("hora_inicio", models.TimeField()),
                ("hora_fim", models.TimeField()),
                ("atividade", models.CharField(max_length=255)),
                ("descricao", models.TextField(blank=True)),
                ("local_especifico", models.CharField(blank=True, max_length=255)),
                ("responsavel", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "evento",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cronograma",
                        to="event_registry.event",
                    ),
                ),
            ],
            options={
                "db_table": "cronograma_eventos",
                "ordering": ["data", "hora_inicio"],
                "verbose_name_plural": "schedule entries",
                "indexes": [
                    models.Index(fields=["evento", "data", "hora_inicio"], name="cronograma_order_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        db_column="id",
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="profile",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                ("nome", models.CharField(max_length=255)),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("admin", "Admin"),
                            ("registrant", "Registrant"),
                            ("public", "Public"),
                        ],
                        default="registrant",
                        max_length=16,
                    ),
                ),
                (
                    "status_pedido",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                        ],
                        default="approved",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["-created_at"],
            },
        ),
    ]
