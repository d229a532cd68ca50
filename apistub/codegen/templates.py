"""Fixed runtime-support sources written next to the generated API.

``REQUEST_TEMPLATE`` is the request builder every generated method returns;
it is rewritten on every run and imports the configuration module named by
``render_request_module``. ``HTTP_CONFIG_TEMPLATE`` is the axios instance
the builder sends through; it is written once and then left to the user.
"""

from apistub.codegen.utils import string_literal

__all__ = ['HTTP_CONFIG_TEMPLATE', 'REQUEST_TEMPLATE', 'render_request_module']

REQUEST_TEMPLATE = """\
import axios from {config_module};
import { AxiosProgressEvent, AxiosResponse, ResponseType } from 'axios';

type ProgressHandler = (progressEvent: AxiosProgressEvent) => void;

export class Request {
  abortController?: AbortController;
  request?: Promise<AxiosResponse>;
  private _url: string;
  private _method: string;
  private _params?: object;
  private _headers?: object;
  private _timeout?: number;
  private _data?: object;
  private _onUploadProgress?: ProgressHandler;
  private _onDownloadProgress?: ProgressHandler;
  private _responseType?: ResponseType;

  constructor({
    url,
    method = 'get',
    params,
    headers,
    timeout,
    data,
    onUploadProgress,
    onDownloadProgress,
    responseType = 'json',
  }: {
    url: string;
    method?: string;
    params?: object;
    headers?: object;
    timeout?: number;
    data?: object;
    onUploadProgress?: ProgressHandler;
    onDownloadProgress?: ProgressHandler;
    responseType?: ResponseType;
  }) {
    this._url = url;
    this._method = method;
    this._params = params;
    this._headers = headers;
    this._timeout = timeout;
    this._data = data;
    this._onUploadProgress = onUploadProgress;
    this._onDownloadProgress = onDownloadProgress;
    this._responseType = responseType;
  }

  url(): string;
  url(url: string): Request;
  url(url?: string): Request | string {
    if (url === undefined) {
      return this._url;
    }
    this._url = url;
    return this;
  }

  data(): object | undefined;
  data(data: object): Request;
  data(data?: object): Request | object | undefined {
    if (data === undefined) {
      return this._data;
    }
    this._data = data;
    return this;
  }

  timeout(): number | undefined;
  timeout(ms: number): Request;
  timeout(ms?: number): Request | number | undefined {
    if (ms === undefined) {
      return this._timeout;
    }
    this._timeout = ms;
    return this;
  }

  headers(): object | undefined;
  headers(headers: object): Request;
  headers(headers?: object): Request | object | undefined {
    if (headers === undefined) {
      return this._headers;
    }
    this._headers = headers;
    return this;
  }

  params(): object | undefined;
  params(params: object): Request;
  params(params?: object): Request | object | undefined {
    if (params === undefined) {
      return this._params;
    }
    this._params = params;
    return this;
  }

  onDownloadProgress(): ProgressHandler | undefined;
  onDownloadProgress(progress: ProgressHandler): Request;
  onDownloadProgress(progress?: ProgressHandler): Request | ProgressHandler | undefined {
    if (progress === undefined) {
      return this._onDownloadProgress;
    }
    this._onDownloadProgress = progress;
    return this;
  }

  onUploadProgress(): ProgressHandler | undefined;
  onUploadProgress(progress: ProgressHandler): Request;
  onUploadProgress(progress?: ProgressHandler): Request | ProgressHandler | undefined {
    if (progress === undefined) {
      return this._onUploadProgress;
    }
    this._onUploadProgress = progress;
    return this;
  }

  responseType(): ResponseType | undefined;
  responseType(responseType: ResponseType): Request;
  responseType(responseType?: ResponseType): Request | ResponseType | undefined {
    if (responseType === undefined) {
      return this._responseType;
    }
    this._responseType = responseType;
    return this;
  }

  requestAsync(abort = true): Promise<AxiosResponse> {
    // abort the previous request
    if (abort) {
      this.abort();
    }
    this.abortController = new AbortController();
    return (this.request = axios(this._url, {
      method: this._method,
      signal: this.abortController.signal,
      params: this._params,
      headers: this._headers,
      data: this._data,
      timeout: this._timeout,
      onDownloadProgress: this._onDownloadProgress,
      onUploadProgress: this._onUploadProgress,
      responseType: this._responseType,
    }));
  }

  abort() {
    this.abortController?.abort();
  }
}
"""

HTTP_CONFIG_TEMPLATE = """\
import axios from 'axios';

const instance = axios.create();

instance.interceptors.request.use((config) => {
  const contentType = config.headers?.['Content-Type'];
  if (
    contentType === 'multipart/form-data' ||
    contentType === 'application/x-www-form-urlencoded'
  ) {
    const formData = new FormData();
    for (const key in config.data) {
      const value = config.data[key];
      if (value === undefined) {
        continue;
      }
      if (Array.isArray(value)) {
        value.forEach((item, index) => formData.append(`${key}[${index}]`, item));
      } else if (value instanceof Blob) {
        formData.append(key, value);
      } else if (typeof value === 'object') {
        formData.append(key, JSON.stringify(value));
      } else {
        formData.append(key, value);
      }
    }
    config.data = formData;
  }
  return config;
});

// configure the instance here: baseURL, auth headers, interceptors

export default instance;
"""


def render_request_module(config_module: str = './config') -> str:
    """The request builder, importing axios from ``config_module``."""
    return REQUEST_TEMPLATE.replace('{config_module}', string_literal(config_module), 1)
