from cloud_mock.main import serve

serve()
