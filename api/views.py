import logging

from django.conf import settings
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import api_view
from rest_framework.response import Response

from api.jobs import JobAlreadyRunning, job_registry
from api.serializers import TranslationJobSerializer
from api.translation import input_folder, list_text_files, output_folder


def serialize_job(job):
    return TranslationJobSerializer(job).data if job is not None else None


@api_view(['GET'])
def describe(request):
    extension = settings.TRANSLATOR_FILE_EXTENSION
    return Response({
        "message": "Translation Module API",
        "endpoints": {
            "/process": f"Process all {extension} files in input folder",
            "/status": "Get processing status",
            "/jobs": "List translation jobs started since the server came up",
            "/jobs/<id>": "Get a single translation job",
        }
    })


@api_view(['POST'])
def process(request):
    try:
        logging.info("Starting translation process...")
        job = job_registry.start(trigger="http")
    except JobAlreadyRunning as e:
        return Response({"error": str(e), "job": serialize_job(e.job)}, status=status.HTTP_409_CONFLICT)
    except Exception as e:
        logging.error(f"Could not start translation process: {e}")
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        "message": "Translation process started",
        "status": "processing",
        "job": serialize_job(job),
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
def processing_status(request):
    try:
        input_files = list_text_files(input_folder())
        output_files = list_text_files(output_folder())
    except OSError as e:
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        "inputFiles": input_files,
        "outputFiles": output_files,
        "inputFolder": settings.TRANSLATOR_INPUT_FOLDER,
        "outputFolder": settings.TRANSLATOR_OUTPUT_FOLDER,
        "job": serialize_job(job_registry.latest()),
    }, status=status.HTTP_200_OK)


class TranslationJobViewSet(viewsets.ViewSet):
    def list(self, request):
        serializer = TranslationJobSerializer(job_registry.all(), many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        job = job_registry.get(pk)
        if job is None:
            return Response({"error": f"Translation job {pk} not found."}, status=status.HTTP_404_NOT_FOUND)
        return Response(serialize_job(job), status=status.HTTP_200_OK)
